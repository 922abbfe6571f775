from tick_boxchain.app import main

main()
