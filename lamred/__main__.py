from lamred.main import main

main()
