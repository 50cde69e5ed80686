from ainoz.relayer.main import run

run()
