import sys

from create_ferod_app.cli import main

sys.exit(main())
