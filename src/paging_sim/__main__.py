"""Allow ``python -m paging_sim [config.json]``."""

from paging_sim.repl import run

run()
