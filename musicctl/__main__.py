from musicctl.cli import main

main()
