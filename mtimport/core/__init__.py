"""Logging, exceptions, defaults and run statistics shared by mtimport."""
