"""Status badges — category-coloured HTML pills for free-text statuses.

A status such as "active" or "on_hold" resolves to one of five categories
(success, warning, danger, info, default), each with its own icon and
colours. The badge stylesheet is registered once per process through the
style registry, on first render.
"""

__version__ = "0.1.0"
