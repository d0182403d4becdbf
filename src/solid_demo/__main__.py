import sys

from solid_demo.cli import main

sys.exit(main())
