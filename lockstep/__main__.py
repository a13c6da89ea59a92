from lockstep.cli import cli

cli()
