import sys

from mets_distiller.cli import main

sys.exit(main())
