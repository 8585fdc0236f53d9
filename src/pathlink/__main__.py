from pathlink.cli import cli

cli()
