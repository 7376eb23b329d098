from duck.main import main

main()
