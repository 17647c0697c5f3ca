from postlint.cli import app

app(prog_name="postlint")
