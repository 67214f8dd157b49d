from dirdedup.cli import main

main()
