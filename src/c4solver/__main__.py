from c4solver.main import main

main()
