class InputClosed(EOFError):
    """The player's input stream ended while a prompt was waiting."""
