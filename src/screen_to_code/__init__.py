"""screen-to-code -- turn reference page screenshots into HTML/Tailwind code."""

__version__ = '0.1.0'
