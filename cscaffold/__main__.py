from cscaffold.cli import main

main()
