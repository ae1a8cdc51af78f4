import sys

from skim.repl import main

sys.exit(main())
