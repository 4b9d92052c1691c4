import sys

from fluid_tokens.app_shell.cli import main

sys.exit(main())
