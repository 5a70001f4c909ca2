import sys

from java_oas_generator.cli import main

sys.exit(main())
