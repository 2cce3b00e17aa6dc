"""Ad Distribution Service test data contract"""
