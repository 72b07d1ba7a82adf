from goodschain.server import run

run()
