from codegraph_outline.cli import app

app()
