import sys

from spell_suggester.cli.cli import main

sys.exit(main())
