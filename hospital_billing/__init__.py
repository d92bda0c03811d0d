"""Hospital patient billing: accounts, price lists, sessions and a Tk window."""

__version__ = "0.1.0"
__all__ = ["billing", "session", "gui"]