"""ViewModel package for list screen state and command surfaces.

Call context:
    ``iacc/app/composition.py`` builds ``ListVM`` instances and
    ``iacc/app/main.py`` binds them to Tk views.

Dependencies:
    Modules in this package depend on domain types, ports, and formatting
    helpers only. Transport and persistence stay in ``iacc.adapters``.
"""
