# english_inflect/__main__.py
import sys

from english_inflect.cli import main

sys.exit(main())
