import sys

from health_events_reporter.index import main

sys.exit(main())
