from user_registry.cli import app

app(prog_name="user-registry")
