"""GoodsChain vehicle-sales REST backend."""
