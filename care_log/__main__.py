import sys

from care_log.main import main

sys.exit(main())
