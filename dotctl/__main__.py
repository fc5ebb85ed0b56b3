from dotctl.cli import app

app()
