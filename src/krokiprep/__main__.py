from krokiprep.cli import main

main()
