"""depscope: explore metadata dependency graphs by selection and query."""

__version__ = "0.3.0"
