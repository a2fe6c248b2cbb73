"""Code shared by the store, gateway and frontend services"""
