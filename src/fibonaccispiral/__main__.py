"""Allows `python -m fibonaccispiral`."""
from fibonaccispiral.main import main

if __name__ == "__main__":
    main()
