import sys

from yliw.main import main

sys.exit(main())
