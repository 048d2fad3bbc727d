from mcpcatalog.cli import main

main()
