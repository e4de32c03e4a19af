try:
    from backend.clientaddr.server import create_app
except ImportError:  # pragma: no cover
    from clientaddr.server import create_app

app = create_app()
