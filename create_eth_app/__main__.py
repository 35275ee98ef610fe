import sys

from create_eth_app.cli import main

sys.exit(main())
