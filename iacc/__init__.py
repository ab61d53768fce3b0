"""iACC list client: composable item-loading pipeline with a Tk shell."""

__version__ = "0.1.0"
