import sys

from idcheck.main import main

sys.exit(main())
