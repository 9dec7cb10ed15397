from uploader.cli import main

main(prog_name="uploader")
