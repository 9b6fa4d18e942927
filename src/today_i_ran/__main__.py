from today_i_ran.cli.main import cli

cli()
