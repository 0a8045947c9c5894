import sys

from src.demo.main import main

sys.exit(main())
