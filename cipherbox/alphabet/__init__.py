"""Classical ciphers: A1Z26, Atbash, Bacon, Caesar, ROT13, scytale, substitution, Trithemius, Vigenere and XOR."""