from adimport.cli import main

main()
