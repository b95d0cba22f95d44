import sys
from dotnotes.cli import main

sys.exit(main())
