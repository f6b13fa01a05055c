"""HTTP routers for FoodBridge"""
