import sys

from pipeline_lineage.cli import main

sys.exit(main())
