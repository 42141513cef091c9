class WeatherProxyError(Exception):
    """
    Base exception for the weather proxy.

    Subclasses carry the HTTP status and the client-facing message used when
    the error is answered. The exception text itself is for server logs only.
    """

    status_code: int = 500
    public_message: str = "Erreur serveur."
