from commitgen.cli import app

app(prog_name="commitgen")
