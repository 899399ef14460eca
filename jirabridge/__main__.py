import sys

from jirabridge.main import main

sys.exit(main())
