"""
Development runner: starts the Fibonacci spiral window from a source checkout.

The package lives under 'src/', so it is put on sys.path first; an installed
copy (`pip install -e .`) is not required. Arguments are passed through, so
`python run.py --debug --log-file spiral.log` works as with the installed
`fibonaccispiral` command.
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from fibonaccispiral.main import main

if __name__ == "__main__":
    main()
