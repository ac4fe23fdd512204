import sys

from capla_converter.cli import main

sys.exit(main())
