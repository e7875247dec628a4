import sys

from investment_calculator.cli import main

sys.exit(main())
