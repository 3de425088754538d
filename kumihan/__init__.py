"""Japanese typesetting: kinsoku line breaking, ruby, vertical forms and a plain-text CLI."""

__version__ = "0.1.0"