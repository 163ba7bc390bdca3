from src.chit_picker.app.entrypoint import main

main()
