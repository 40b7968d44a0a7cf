from hamper_deck.cli import run_cli

run_cli()
