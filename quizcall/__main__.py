import sys

from quizcall.app import main

sys.exit(main())
