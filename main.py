"""Local development entrypoint.

Exposes `app` so `flask --app main run` and plain `python main.py` both work.
"""

from party_draw import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
