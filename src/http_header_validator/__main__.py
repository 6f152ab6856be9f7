import sys

from http_header_validator.cli import main

sys.exit(main())
