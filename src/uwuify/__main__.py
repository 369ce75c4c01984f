from uwuify.cli import main

main()
