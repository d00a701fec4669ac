import sys

from openai_descriptors.cli import main

sys.exit(main())
