"""Allow ``python -m hevy_bridge``."""

from hevy_bridge.app import main

main()
