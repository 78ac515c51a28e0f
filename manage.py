"""
This is the main file to run the game.
It imports the run function from the lameboy package and runs it.
"""

from lameboy.app import run

if __name__ == "__main__":
    run()
