"""Import pipeline: the mt2html driver and its click command."""
