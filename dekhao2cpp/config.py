class Config:
    """Defaults shared by the CLI and the HTTP server.

    The server also reads ``DEKHAO2CPP_<NAME>`` environment variables on top of
    these (``DEKHAO2CPP_PORT=8080``, ``DEKHAO2CPP_DEBUG=true``).
    """

    SOURCE_FILE = "input.txt"
    TARGET_FILE = "generated.cpp"

    HOST = "0.0.0.0"
    PORT = 5000
    DEBUG = False
    # frontend dev server
    CORS_ORIGINS = ["http://localhost:3000", "*"]

    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
