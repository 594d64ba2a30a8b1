import sys

from yamatrix.demo import main

sys.exit(main())
