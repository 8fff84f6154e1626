import sys

from letter_grader.main import main

sys.exit(main())
