def decode_value(token):
    # Decode a command-line token into an int, a float, or leave it as text.
    try:
        return int(token)
    except ValueError:
        pass

    try:
        return float(token)
    except ValueError:
        return token

def decode_values(tokens):
    return [decode_value(token) for token in tokens]
