from product_slides.app import main

raise SystemExit(main())
