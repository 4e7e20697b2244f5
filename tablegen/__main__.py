import sys

from tablegen.main import main

sys.exit(main())
