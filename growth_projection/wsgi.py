#setup: pip install -e ".[test]"
#setup: flask --app growth_projection.wsgi run --port 5000 --debug

from growth_projection.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
