import sys

from html_grader.app import main

sys.exit(main())
