"""Component types attached to scene entities: camera, lights, movement, mesh renderer, gameplay and tags."""