from .converter_app import main

main()
