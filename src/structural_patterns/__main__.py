import sys

from structural_patterns.cli.main import main

sys.exit(main())
