class MissingContextError(RuntimeError):
    """The session store was used before the app root provided it."""


class MissingTokenError(Exception):
    """The server answered 2xx but the body carried no token."""
