from floorboards.cli.main import app

app()
