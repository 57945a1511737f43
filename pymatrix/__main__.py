from pymatrix.demo import main

raise SystemExit(main())
