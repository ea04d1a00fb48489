import sys

from package_xml_viewer.cli import main

sys.exit(main())
