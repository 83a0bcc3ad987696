"""Steps, with the initializers and finalizers that control them."""