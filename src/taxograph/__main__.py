from taxograph.ui.cli import run

run()
