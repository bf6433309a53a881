# seed_data.py
"""
Insert the sample subscribers into the configured database.

Same as ``python -m subscriber_api.seed``.
"""

import sys

from subscriber_api.seed import main

if __name__ == "__main__":
    sys.exit(main())
