import sys

from base16_manager.cli.main import main

sys.exit(main())
