from price_proxy.server import run

run()
