from dirtitle.cli import main

main()
