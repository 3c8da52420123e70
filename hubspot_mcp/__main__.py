import sys

from hubspot_mcp.server.app import main

if __name__ == "__main__":
    sys.exit(main())
