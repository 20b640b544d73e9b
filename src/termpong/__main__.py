from termpong.main import main

main()
