from vector_lab.main import main

main()
